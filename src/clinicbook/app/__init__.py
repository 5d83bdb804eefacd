"""
The APP layer binds the model to Qt: it re-emits model changes as signals.
"""
