"""
FM_STEPS — FileMaker script step decompiler.
Renders exported script step XML into one canonical text line per step,
so visual scripts can be diffed and version-controlled.
"""

__version__ = "0.1.0"

from fm_steps.errors import MalformedInput, StepRenderError
from fm_steps.steps import StepKind, classify
from fm_steps.parameters import BooleanDisplayPolicy, decode
from fm_steps.renderer import render
from fm_steps.decompile import decompile_xml

__all__ = [
    "__version__",
    "BooleanDisplayPolicy",
    "MalformedInput",
    "StepKind",
    "StepRenderError",
    "classify",
    "decode",
    "decompile_xml",
    "render",
]
