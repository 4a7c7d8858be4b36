"""
Standalone job entry points (run with python -m jobs.<name>).
"""
