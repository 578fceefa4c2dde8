"""
agent-os-installer: fetches the Agent OS agent, prompt and standards files
into a local workspace.
"""

__version__ = "1.0.0"
