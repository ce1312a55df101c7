"""
The Easily Extendable Language: a tiny embeddable scripting language where everything is text.
"""
