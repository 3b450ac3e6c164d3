"""Конфигурация клиента и логирования."""
