"""
Geometry Errors — типизированные ошибки геометрического ядра

Все ошибки ядра наследуются от GeometryError и передаются вызывающему коду
как есть: геометрия детерминирована, поэтому retry не имеет смысла.

ВАЖНО: ошибки НЕ наследуются от ValueError. Pydantic заворачивает ValueError
из валидаторов в ValidationError, а ошибки ядра должны доходить до
вызывающего кода своим типом.
"""


class GeometryError(Exception):
    """Базовая ошибка геометрического ядра."""

    pass


class ConversionFailure(GeometryError):
    """
    Значение не представимо при переходе между canonical float64 и типом T.

    Примеры: π или epsilon в целочисленном типе, 1e40 в float32,
    отрицательное значение в беззнаковом типе.
    """

    pass


class CalculationFailure(GeometryError):
    """
    Зависимое вычисление (например, distance2) завершилось ошибкой.

    Сообщение включает сообщение исходной ошибки, исходная ошибка
    доступна через __cause__.
    """

    pass


class InstantiationFailure(GeometryError):
    """Фигура не может быть построена (мало вершин, ошибка расчёта площади)."""

    pass


class MutationFailure(GeometryError):
    """Структурное изменение (вставка вершины) не имеет допустимого места."""

    pass
