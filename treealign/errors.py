class DiagramError(Exception):
    pass


class ConfigurationError(DiagramError):
    pass


class LayoutError(DiagramError):
    pass


class MeasurementIncompleteError(LayoutError, KeyError):
    def __str__(self) -> str:
        return Exception.__str__(self)


class LayoutOverflowError(DiagramError):
    pass
