"""Material Symbols build pipeline: icon modules, metadata and entry exports."""
