"""
Version 1 of the API.

The storefront frontend calls these routes under the unversioned
``/api`` prefix.  Breaking changes should go into a new version
subpackage (e.g. ``v2``) mounted under its own prefix.
"""
