"""Ресурсы контрактов: JSON Schema файлы, поставляемые вместе с пакетом."""
