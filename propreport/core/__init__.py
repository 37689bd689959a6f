# propreport/core/__init__.py
"""
Core components: report model, builder, emitter, task.

Submodules are imported explicitly; nothing is re-exported here so that
config and core can import each other's leaves without cycles.
"""
