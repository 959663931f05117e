"""Console output: plain-text tables for quotes, searches, and the portfolio."""
