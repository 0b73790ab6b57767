"""HTTP host adapter package."""
