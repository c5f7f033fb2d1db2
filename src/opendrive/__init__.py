"""Reading and writing ASAM OpenDRIVE 1.7 road networks.

Documents are parsed into a tree of typed elements mirroring the OpenDRIVE
schema, which can be inspected, modified, and written back:

.. code-block:: python

    from opendrive import OpenDrive

    network = OpenDrive.from_file("town.xodr")
    for road in network.road:
        print(road.id_, road.length.metres)
    xml = network.to_xml_string()

.. raw:: html

   <h2>Submodules</h2>

.. autosummary::
   :toctree:

   document
   common
   core
   road
   lane
   objects
   signals
   junction
"""

from opendrive.core.errors import (
    AttributeMissing,
    ChildMissing,
    ElementMissing,
    InvalidEnumValue,
    InvalidValueFor,
    OpenDriveError,
    OpenDriveParseError,
    OpenDriveWarning,
    OpenDriveWriteError,
    ParseError,
    XmlError,
)
from opendrive.core.options import ParseOptions, UnknownElementPolicy
from opendrive.document import OpenDrive
