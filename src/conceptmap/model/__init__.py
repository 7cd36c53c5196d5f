"""
The MODEL layer contains pure data structures and interaction logic.
It has NO knowledge of the GUI (Qt).
It deals with Concepts, Layout, and the connect gesture.
"""
