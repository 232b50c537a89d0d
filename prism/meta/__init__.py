"""Embedded image metadata for PNG and JPEG streams, with format detection."""