class BaseBlockfallError(Exception):
    pass
