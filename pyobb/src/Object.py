class Object:
    """Base class providing common object functionality."""

    # Serialization discriminant, chosen explicitly by each serializable class
    typeName = None

    def __init__(self):
        pass

    def getClassName(self) -> str:
        """Returns the class name of this instance."""
        return self.__class__.__name__
