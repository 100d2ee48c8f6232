"""
QUIRE - resume composition, rendering, and export

Turns AI-written resume text into styled documents ready for preview and PDF export.

Architecture:
- Generation Context: AI generation and enhancement of resume text
- Templating Context: Resume text parsing and template/style configuration
- Rendering Context: Visual tree rendering, HTML projection, and PDF export
"""

__version__ = "0.1.0"
