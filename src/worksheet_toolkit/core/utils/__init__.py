"""
Utils Package

Serialization and formatting helpers. Import the submodules directly:

- core.utils.serialization: JSON load/save for worksheets
- core.utils.formatting: display text and operator normalization
"""
