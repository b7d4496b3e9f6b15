"""Protocol definitions for lmsbuild adapters.

Services depend on these protocols rather than on concrete adapters so that
tests can substitute mocks with ``Mock(spec=...)``.
"""

from lmsbuild.protocols.file_adapter_protocol import FileAdapterProtocol
from lmsbuild.protocols.template_adapter_protocol import TemplateAdapterProtocol


__all__ = ["FileAdapterProtocol", "TemplateAdapterProtocol"]
