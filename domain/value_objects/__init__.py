"""Value Objects do domínio"""
from domain.value_objects.coordinates import Coordinates

__all__ = ['Coordinates']
