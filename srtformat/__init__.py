"""SubRip (.srt) normalizer: canonical timestamps, renumbered cues, merged duplicates.

Entry points live in `srtformat.formatter` (library) and `srtformat.cli` (command).
"""

__version__ = "1.0.0"
