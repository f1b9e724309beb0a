"""Materialized node tree mirroring a filtered directory walk.

This package provides the node type and the result object that owns both the
rendered lines and the root node of a generated tree.
"""
