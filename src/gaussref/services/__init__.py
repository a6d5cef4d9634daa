"""Service layer — operations returning ServiceResult.

Services may import from domain and config. Domain errors are turned
into structured results here and never leak past this layer.
"""
