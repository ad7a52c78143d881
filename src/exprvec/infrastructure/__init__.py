"""
Infrastructure layer of exprvec: NumPy-backed storages, lazy expression
nodes with the fusing assignment, and the `Vector` facade built on them.
"""
