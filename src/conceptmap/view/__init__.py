"""
The VIEW layer contains Qt widgets: the mind-map surface, the side panels and
the main window. Widgets read from the Store and request changes through it.
"""
