"""Step kinds and the static id → kind registry."""

from enum import Enum


class StepKind(Enum):
    """Selects how a step's fragments are assembled into its final line."""
    COMMENT = 'comment'
    GENERIC = 'generic'


# ============================================================
#  STEP REGISTRY
# ============================================================

# FM step id → kind. Only ids with special assembly are listed.
STEP_KINDS = {
    89: StepKind.COMMENT,    # # (comment)
}

# Script block structure, used for indentation when decompiling a whole script
BLOCK_OPENERS = {
    68,     # If
    71,     # Loop
}
BLOCK_CONTINUATIONS = {
    69,     # Else
    125,    # Else If
}
BLOCK_CLOSERS = {
    70,     # End If
    73,     # End Loop
}


def step_id_to_int(step_id):
    """Coerce an id read from XML (str) or passed by a caller (int) to int.
    Returns None when the id is missing or not numeric."""
    if isinstance(step_id, bool):
        return None
    if isinstance(step_id, int):
        return step_id
    try:
        return int(str(step_id).strip())
    except (TypeError, ValueError):
        return None


def classify(step_id):
    """Map a numeric step id to its StepKind. Never fails; unmapped ids are GENERIC."""
    return STEP_KINDS.get(step_id_to_int(step_id), StepKind.GENERIC)
