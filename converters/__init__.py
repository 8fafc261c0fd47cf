# Converters from upstream Bible datasets to the canonical chapter layout
