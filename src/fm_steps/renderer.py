"""
Step renderer: one <Step> XML fragment → one line of text.

    <Step id="182" name="Tabelle leeren" enable="True">
        <ParameterValues membercount="2">
            <Parameter type="Boolean">
                <Boolean type="Mit Dialog" id="128" value="False"></Boolean>
            </Parameter>
            <Parameter type="List">
                <List name="&lt;Tabelle nicht vorhanden&gt;" value="1"></List>
            </Parameter>
        </ParameterValues>
    </Step>

renders as ``Tabelle leeren [ Mit Dialog: OFF ; <Tabelle nicht vorhanden> ]``.
"""

import logging
import xml.etree.ElementTree as ET

from fm_steps.errors import MalformedInput
from fm_steps.parameters import decode
from fm_steps.steps import StepKind, classify

logger = logging.getLogger(__name__)

FRAGMENT_SEPARATOR = ' ; '

# Path from the Step root to a typed value element: Step > ParameterValues > Parameter > *
_PARAMETER_PATH = ('Step', 'ParameterValues', 'Parameter')


# ============================================================
#  ASSEMBLY (one strategy per StepKind)
# ============================================================

def _assemble_comment(name, joined):
    # The step name ("# (Kommentar)") is never shown; a comment without text renders as nothing
    if not joined.strip():
        return ''
    return f"# {joined}"


def _assemble_generic(name, joined):
    if name is None:
        raise MalformedInput("Step element has no name attribute")
    joined = joined.strip()
    if not joined:
        return name
    return f"{name} [ {joined} ]"


ASSEMBLERS = {
    StepKind.COMMENT: _assemble_comment,
    StepKind.GENERIC: _assemble_generic,
}


# ============================================================
#  EVENT STREAM
# ============================================================

def _iter_events(step_xml):
    """Yield (event, element) pairs for the fragment.

    Syntax errors are terminal. Elements still open at end of input are
    tolerated, so a lone ``<Step ...>`` start tag renders like an empty step;
    anything left over after the root element has closed is not.
    """
    parser = ET.XMLPullParser(events=('start', 'end'))
    depth = 0
    try:
        parser.feed(step_xml)
        for event, elem in parser.read_events():
            depth += 1 if event == 'start' else -1
            yield event, elem
    except ET.ParseError as e:
        raise MalformedInput(f"XML parse error: {e}") from e

    close_error = None
    try:
        parser.close()
    except ET.ParseError as e:
        close_error = e
    try:
        remaining = list(parser.read_events())
    except ET.ParseError as e:
        raise MalformedInput(f"XML parse error: {e}") from e
    depth += sum(1 if event == 'start' else -1 for event, _ in remaining)

    if close_error is not None:
        if depth <= 0:
            raise MalformedInput(f"XML parse error: {close_error}") from close_error
        logger.debug("Input ended with unclosed elements: %s", close_error)
    yield from remaining


def collect(step_xml):
    """Parse a step fragment into (name, fragments).

    Fragments are in document order across all ParameterValues blocks, with
    omitted parameters already dropped.
    """
    name = None
    found_step = False
    fragments = []
    stack = []              # open element tags, root first
    parameter_type = None   # type of the innermost open <Parameter>
    decoded = False         # the current <Parameter> already produced its value

    for event, elem in _iter_events(step_xml):
        if event == 'end':
            stack.pop()
            continue

        if not stack:
            if elem.tag != 'Step':
                raise MalformedInput(f"Expected <Step> root element, found <{elem.tag}>")
            found_step = True
            name = elem.get('name')
        elif tuple(stack) == _PARAMETER_PATH[:2] and elem.tag == 'Parameter':
            parameter_type = elem.get('type')
            decoded = False
        elif tuple(stack) == _PARAMETER_PATH and not decoded:
            decoded = True
            fragment = decode(parameter_type or elem.tag, dict(elem.attrib))
            if fragment is not None:
                fragments.append(fragment)

        stack.append(elem.tag)

    if not found_step:
        raise MalformedInput("No <Step> element found")

    return name, fragments


# ============================================================
#  PUBLIC API
# ============================================================

def render(step_id, step_xml):
    """Render one step fragment into its canonical text line.

    Args:
        step_id: numeric FM step id (int or numeric str), selects the StepKind
        step_xml: XML text of exactly one <Step> element

    Returns:
        The rendered line, possibly empty (comment steps without text).

    Raises:
        MalformedInput: the XML does not parse, the root is not <Step>, or a
            non-comment step has no name.
    """
    if isinstance(step_xml, bytes):
        try:
            step_xml = step_xml.decode('utf-8')
        except UnicodeDecodeError as e:
            raise MalformedInput(f"Step XML is not valid UTF-8: {e}") from e
    name, fragments = collect(step_xml.strip())
    joined = FRAGMENT_SEPARATOR.join(fragments)
    return ASSEMBLERS[classify(step_id)](name, joined)
