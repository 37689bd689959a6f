# propreport/cli/__init__.py
"""
Command line entry point: `propreport properties [--property NAME] ...`
"""
