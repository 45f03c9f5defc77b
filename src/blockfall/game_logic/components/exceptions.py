from blockfall.exceptions import BaseBlockfallError


class NoActivePieceError(BaseBlockfallError):
    pass


class CannotSpawnPieceError(BaseBlockfallError):
    pass


class PieceOutOfBoundsError(BaseBlockfallError):
    pass


class InvalidShapeError(BaseBlockfallError, ValueError):
    pass
