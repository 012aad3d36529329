"""Health Tools Hub: health and fitness calculators."""
