"""The parsing and emission machinery shared by all OpenDRIVE elements.

.. raw:: html

   <h2>Submodules</h2>

.. autosummary::
   :toctree:

   additional_data
   arbitrary
   enums
   errors
   events
   header
   model
   options
   parser
   sequences
   units
   values
"""
