"""Domain Layer - entidades, value objects e exceções"""
