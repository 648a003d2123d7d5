"""R7 delays - delay status for the R7 bus route between Zweibrücken and Homburg (Saar)."""

__version__ = "1.0.0"
