"""
Services for unorunner.

execution/ holds the argument mapper, process runner and result delivery;
uno/ holds the per-executable wrappers built on top of them.
"""
