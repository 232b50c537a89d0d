"""Metadata embedded in PNG streams."""