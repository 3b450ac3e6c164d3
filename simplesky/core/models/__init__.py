"""Модели данных: координаты, параметры запроса, ответ прогноза."""
