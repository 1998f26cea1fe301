"""Custom exception hierarchy for the hexagonal crossword solver."""


class HexCrosswordError(Exception):
    """Base exception for solver failures."""


class ConfigurationError(HexCrosswordError):
    """Raised when a puzzle layout cannot be solved as declared."""


class DuplicateLineError(ConfigurationError):
    """Raised when the same line is registered twice."""


class UnknownLineError(ConfigurationError):
    """Raised when a line is looked up that was never registered."""


class PatternError(ConfigurationError):
    """Raised when a pattern does not compile into a matcher."""


class LineAlignmentError(ConfigurationError):
    """Raised when a line does not start on the outer ring."""


class CellMultiplicityError(ConfigurationError):
    """Raised when a cell is crossed by the wrong number of lines."""


class AlphabetError(ConfigurationError):
    """Raised when the candidate alphabet is not a set of capital letters."""


class AssemblyError(HexCrosswordError):
    """Raised when the joint grid assignment model cannot be built."""
