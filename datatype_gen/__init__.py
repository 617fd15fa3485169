"""
datatype_gen

Generates immutable data type definitions (enumerations, records and
sealed protocol hierarchies) from a schema, with constructors that keep
older field sets compiling as the schema grows.
"""

__version__ = "0.1.0"
