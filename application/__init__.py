"""Application Layer - casos de uso, serviços e portas"""
