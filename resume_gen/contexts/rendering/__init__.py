"""
Rendering Context

Responsibilities:
- Checks rendered HTML for offline compatibility
- Prints HTML to PDF with a headless browser
- Resolves output paths and guards against accidental overwrites

Owns: Offline validation, PDF generation, output management
Never: Modifies template content
"""
