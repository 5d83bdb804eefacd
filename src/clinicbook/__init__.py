"""
clinicbook: the in-memory model of a clinic management tool.
"""
