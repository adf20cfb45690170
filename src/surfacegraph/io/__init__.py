"""
The IO layer connects the pure graph core to the outside world:
PyVista surfaces in, wireframes and stored graphs out.
"""
