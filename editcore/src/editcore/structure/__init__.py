"""Document structure: heading classification, sections, extraction."""
