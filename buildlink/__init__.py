"""
buildlink: declarative software models linked onto an imperative build engine.

A software module (Android library or application) is described by a typed,
convention-driven property graph. At configuration time the model is seeded
with defaults; once the build engine finishes evaluating the project, the
model is linked onto the engine's plugins, extensions and dependency buckets.
"""

__version__ = "0.1.0"
__author__ = "buildlink Team"
