"""
Parameter decoding: one typed <Parameter> element → zero or one display fragment.

Each type discriminator (the Parameter's ``type`` attribute) has one decoder in
PARAMETER_DECODERS. A decoder receives the attributes of the typed value element
(``<Boolean value="True" type="Mit Dialog">``, ``<List name="..." value="1">``)
and returns the fragment text, or None to omit the parameter entirely.
"""

import logging
import re
from enum import Enum

from fm_steps.errors import MalformedParameter, StepRenderError, UnknownParameterType

logger = logging.getLogger(__name__)


class BooleanDisplayPolicy(Enum):
    """How a labeled boolean parameter is displayed."""
    VALUE_ONLY = 'value_only'            # ON / OFF
    LABELED_TOGGLE = 'labeled_toggle'    # Label: ON / Label: OFF
    FLAG_IF_TRUE = 'flag_if_true'        # Label when true, nothing when false


# ============================================================
#  BOOLEAN LABEL POLICIES
# ============================================================

# Label text exactly as exported in <Boolean type="...">. Labels are localized
# by FileMaker, so each language's spelling needs its own entry.
BOOLEAN_LABEL_POLICIES = {
    # Commit Records/Requests, Truncate Table, ...
    'Mit Dialog':                               BooleanDisplayPolicy.LABELED_TOGGLE,
    'With dialog':                              BooleanDisplayPolicy.LABELED_TOGGLE,
    # Enter Find Mode
    'Pause':                                    BooleanDisplayPolicy.LABELED_TOGGLE,
    # Commit Records/Requests
    'Dateneingabeüberprüfung unterdrücken':     BooleanDisplayPolicy.FLAG_IF_TRUE,
    'Skip data entry validation':               BooleanDisplayPolicy.FLAG_IF_TRUE,
    'Schreiben erzwingen':                      BooleanDisplayPolicy.FLAG_IF_TRUE,
    'Force Commit':                             BooleanDisplayPolicy.FLAG_IF_TRUE,
}

# Used for labels missing from the table above
DEFAULT_LABEL_POLICY = BooleanDisplayPolicy.LABELED_TOGGLE


def boolean_policy(label):
    """Look up the display policy for a boolean label."""
    if not label:
        return BooleanDisplayPolicy.VALUE_ONLY
    policy = BOOLEAN_LABEL_POLICIES.get(label)
    if policy is None:
        logger.debug("No display policy for label %r, using %s", label, DEFAULT_LABEL_POLICY.name)
        return DEFAULT_LABEL_POLICY
    return policy


# ============================================================
#  DECODERS
# ============================================================

def _on_off(state):
    return 'ON' if state else 'OFF'


def _decode_boolean(attributes):
    raw = attributes.get('value')
    if raw == 'True':
        state = True
    elif raw == 'False':
        state = False
    else:
        raise MalformedParameter(f"Boolean value must be 'True' or 'False', got {raw!r}")

    label = attributes.get('type')
    policy = boolean_policy(label)

    if policy is BooleanDisplayPolicy.VALUE_ONLY:
        return _on_off(state)
    if policy is BooleanDisplayPolicy.LABELED_TOGGLE:
        return f"{label}: {_on_off(state)}"
    # FLAG_IF_TRUE
    return label if state else None


def _decode_list(attributes):
    # Broken references keep their placeholder name (e.g. "<Tabelle nicht vorhanden>")
    # and are rendered like any other choice; the referenced id is not checked.
    name = attributes.get('name')
    if name is None:
        raise MalformedParameter("List parameter has no name attribute")
    return name or None


_LINE_BREAKS = re.compile(r'\s*(?:\r\n|\r|\n)+\s*')


def _decode_comment(attributes):
    text = attributes.get('value')
    if text is None:
        raise MalformedParameter("Comment parameter has no value attribute")
    text = _LINE_BREAKS.sub(' ', text).strip()
    return text or None


# Type discriminator → decoder. New discriminators are added here, one per type.
PARAMETER_DECODERS = {
    'Boolean': _decode_boolean,
    'List': _decode_list,
    'Comment': _decode_comment,
}


def decode_parameter(parameter_type, attributes):
    """Decode one parameter, raising StepRenderError subclasses on failure."""
    decoder = PARAMETER_DECODERS.get(parameter_type)
    if decoder is None:
        raise UnknownParameterType(parameter_type)
    return decoder(attributes)


def decode(parameter_type, attributes):
    """Decode one parameter into a display fragment, or None to omit it.

    Never raises for bad parameters: unknown types and malformed attributes are
    logged and omitted so the rest of the step still renders.
    """
    try:
        return decode_parameter(parameter_type, attributes)
    except UnknownParameterType as e:
        logger.debug("%s, omitted", e)
    except StepRenderError as e:
        logger.warning("Skipping %s parameter: %s", parameter_type, e)
    return None
