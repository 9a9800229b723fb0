"""Catalog Profiles - entity profile composition service.

Declares how catalog entities (datasets) are presented:
- Generic property resolution with override precedence
- Conditionally visible/enabled profile panels (tabs, sidebar sections)
- Preview and search summary projections
"""

__version__ = "0.1.0"
