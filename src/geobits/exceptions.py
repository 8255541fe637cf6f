class GeoBitsError(Exception):
    """Erro base para todos os erros do geobits."""


class InvalidCoordinate(GeoBitsError):
    """Latitude ou longitude fora do intervalo semiaberto permitido."""


class InvalidPrecision(GeoBitsError):
    """Precisao fora do intervalo [1, 32]."""


class InvalidGeoCode(GeoBitsError):
    """Bits ativos fora da faixa definida pela precisao."""
