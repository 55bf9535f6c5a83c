"""
Version 1 of the API.

Routes are mounted under ``settings.api_prefix``, which is empty by
default, so the public paths are ``/robots`` and ``/references``.
"""
