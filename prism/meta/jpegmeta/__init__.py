"""Metadata embedded in JPEG streams."""