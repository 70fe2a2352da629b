# The current foldiff version
VERSION = '1.0.0'
