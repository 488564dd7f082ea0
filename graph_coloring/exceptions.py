class ColoringError(Exception):
    """Base class for errors raised by graph_coloring."""


class GraphError(ColoringError, ValueError):
    pass


class InvalidParameterError(ColoringError, ValueError):
    pass


class ColoringCancelled(ColoringError):
    def __init__(self, algorithm, steps=0):
        super().__init__(f"{algorithm} cancelled after {steps} steps")
        self.algorithm = algorithm
        self.steps = steps


class ConfigError(ColoringError, ValueError):
    pass
