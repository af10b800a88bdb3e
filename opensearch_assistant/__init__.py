"""OpenSearch assistant toolkit.

This package contains the capability layer an LLM agent uses to look up index
metadata in an OpenSearch cluster.

High-level architecture
-----------------------

- ``opensearch_assistant.capabilities``: the ``Capability`` value type and the
  ordered ``CapabilityRegistry`` an orchestrator uses to discover and invoke
  capabilities by name with a single string argument.
- ``opensearch_assistant.tool_sets``: bundles of capabilities sharing one
  backing dependency. ``OpenSearchApiToolSet`` lists index metadata and checks
  index existence.
- ``opensearch_assistant.search_client``: the async HTTP client those
  capabilities call.
- ``opensearch_assistant.factory``: assembles tool sets into a registry.
- ``opensearch_assistant.adapters``: exports a registry as LangChain tools.

Error contract
--------------

Backing failures never raise to the orchestrator. They come back as strings
starting with ``[Error]``. Only registry misuse raises: ``DuplicateNameError``
at assembly and ``NotFoundError`` at invocation.
"""
