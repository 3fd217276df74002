"""Script decompiler: an exported script → plain text, one line per step.

Only the ParameterValues export format is decoded. Clipboard snippets that keep
comment text in <Text> or booleans in <Set state="..."> render their steps
without those values.
"""

import logging
import xml.etree.ElementTree as ET

from fm_steps.errors import MalformedInput
from fm_steps.renderer import render
from fm_steps.steps import BLOCK_CLOSERS, BLOCK_CONTINUATIONS, BLOCK_OPENERS, step_id_to_int

logger = logging.getLogger(__name__)

INDENT = "    "


def decompile_xml(xml_text):
    """Convert FM XML (fmxmlsnippet or saved script) to readable plain text."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise MalformedInput(f"XML parse error: {e}") from e

    lines = []
    indent_level = 0

    for step_elem in root.iter('Step'):
        step_id = step_id_to_int(step_elem.get('id'))
        prefix = "" if step_elem.get('enable', 'True') == 'True' else "// "

        # Decrease indent before End and Else
        if step_id in BLOCK_CLOSERS or step_id in BLOCK_CONTINUATIONS:
            indent_level = max(0, indent_level - 1)
        pad = INDENT * indent_level

        # Increase indent after If, Loop, Else
        if step_id in BLOCK_OPENERS or step_id in BLOCK_CONTINUATIONS:
            indent_level += 1

        try:
            text = render(step_id, ET.tostring(step_elem, encoding='unicode'))
        except MalformedInput as e:
            logger.warning("Skipping step id=%s: %s", step_elem.get('id'), e)
            continue

        if text:
            lines.append(f"{pad}{prefix}{text}")

    return '\n'.join(lines)
