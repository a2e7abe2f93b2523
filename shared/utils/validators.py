"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Type

from domain.exceptions import InvalidInputError


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_range(
        value: float,
        min_val: float,
        max_val: float,
        message: str,
        param_name: str,
        exception_class: Type[Exception] = InvalidInputError
    ) -> float:
        """
        Valida se valor numérico está dentro do range (limites inclusivos)

        Args:
            value: Valor a validar
            min_val: Valor mínimo permitido
            max_val: Valor máximo permitido
            message: Mensagem da exceção
            param_name: Nome do parâmetro (para details)
            exception_class: Classe de exceção a lançar

        Returns:
            Valor validado

        Raises:
            exception_class: Se valor fora do range
        """
        if not (min_val <= value <= max_val):
            raise exception_class(
                message,
                details={
                    param_name: value,
                    "min": min_val,
                    "max": max_val
                }
            )
        return value

    @staticmethod
    def validate_not_empty(
        value: str,
        message: str,
        exception_class: Type[Exception] = InvalidInputError
    ) -> str:
        """
        Valida se string não está vazia (ignorando espaços nas pontas)

        Args:
            value: String a validar
            message: Mensagem da exceção
            exception_class: Classe de exceção a lançar

        Returns:
            String trimmed

        Raises:
            exception_class: Se string vazia
        """
        trimmed = (value or "").strip()
        if not trimmed:
            raise exception_class(message, details={"value": value})
        return trimmed


class CoordinatesValidator:
    """Validate latitude/longitude pair"""

    MIN_LATITUDE = -90.0
    MAX_LATITUDE = 90.0
    MIN_LONGITUDE = -180.0
    MAX_LONGITUDE = 180.0

    @staticmethod
    def validate(latitude: float, longitude: float) -> None:
        """
        Raises:
            InvalidInputError: If latitude or longitude is out of range
        """
        GenericValidator.validate_range(
            value=latitude,
            min_val=CoordinatesValidator.MIN_LATITUDE,
            max_val=CoordinatesValidator.MAX_LATITUDE,
            message="Latitude must be between -90 and 90",
            param_name="latitude"
        )
        GenericValidator.validate_range(
            value=longitude,
            min_val=CoordinatesValidator.MIN_LONGITUDE,
            max_val=CoordinatesValidator.MAX_LONGITUDE,
            message="Longitude must be between -180 and 180",
            param_name="longitude"
        )


class CityCodeValidator:
    """Validate city code / free-text place identifier"""

    @staticmethod
    def validate(city_code: str) -> str:
        """
        Returns:
            The trimmed city code (used only for the emptiness check)

        Raises:
            InvalidInputError: If city_code is empty or whitespace only
        """
        return GenericValidator.validate_not_empty(
            value=city_code,
            message="City code cannot be empty"
        )
