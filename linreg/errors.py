class InvalidRange(ValueError):
    """Raised when a prediction range is empty or cannot terminate."""

    def __init__(self, message: str = "Minimum input value cannot be higher or equal to maximum input value!") -> None:
        super().__init__(message)


class NoTrainingData(ValueError):
    """Raised when an operation needs stored training pairs and there are none."""

    def __init__(self, message: str = "Training data missing!") -> None:
        super().__init__(message)
