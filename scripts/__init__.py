"""Console scripts for batch matching and scenario checks."""
