"""Exceptions raised while rendering script steps."""


class StepRenderError(Exception):
    """Base class for all step rendering errors."""


class MalformedInput(StepRenderError, ValueError):
    """The step XML cannot be parsed, or its Step element or name is missing.

    This is the only error that fails a whole render.
    """


class UnknownParameterType(StepRenderError):
    """No decoder is registered for a parameter's type discriminator."""

    def __init__(self, parameter_type):
        super().__init__(f"No decoder for parameter type {parameter_type!r}")
        self.parameter_type = parameter_type


class MalformedParameter(StepRenderError):
    """A parameter's attributes cannot be decoded."""
