"""Roads: reference lines, profiles, surfaces, and railroad elements.

.. raw:: html

   <h2>Submodules</h2>

.. autosummary::
   :toctree:

   road
   geometry
   profiles
   surface
   railroad
"""
