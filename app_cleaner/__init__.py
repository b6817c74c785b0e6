"""
Terminal utility for finding and removing files an application leaves behind.

The scanner only reads the filesystem; deletion happens in the console after
an explicit confirmation, so the locator can be reused on its own.
"""
