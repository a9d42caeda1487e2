"""
resume-gen - ATS-friendly PDF resumes from JSON Resume documents

Turns a JSON Resume file into a styled, self-contained HTML document and prints
it to PDF with a headless browser.

Architecture:
- Intake Context: JSON loading and schema validation
- Templating Context: Template selection, caching and HTML generation
- Rendering Context: Offline compatibility checks and PDF output
"""

__version__ = "1.0.0"
