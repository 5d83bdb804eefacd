"""
The CONTROLLER layer runs commands against the model.
"""
