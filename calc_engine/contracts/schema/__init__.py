"""JSON Schema (Draft 2020-12) контрактов calc_engine."""
