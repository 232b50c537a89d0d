"""Parsing of ICC colour profile headers and descriptions."""