"""
tokeq.io
========

Reading equilibrium files: store adapter, typed extraction, errors, config.

Design
------
• store.py is the only module that touches h5py.
• extract.py turns store variables into validated numpy arrays.
"""
