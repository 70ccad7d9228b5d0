"""Adapters subpackage: getting XML into and out of jxon.

- ``MinidomAdapter`` turns XML text into a DOM root element (stdlib only).
- ``XmlLoader`` fetches XML from URLs or files asynchronously.  It needs the
  ``http`` extra at instantiation time::

      pip install jxon[http]

Both sit outside the conversion core; the core never performs I/O.
"""

from jxon.adapters.loader import XmlLoader
from jxon.adapters.minidom import MinidomAdapter

__all__ = ["MinidomAdapter", "XmlLoader"]
