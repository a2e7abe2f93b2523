"""Settings storage adapters"""
from .in_memory_settings_store import InMemorySettingsStore
from .json_settings_store import JsonFileSettingsStore

__all__ = ['InMemorySettingsStore', 'JsonFileSettingsStore']
