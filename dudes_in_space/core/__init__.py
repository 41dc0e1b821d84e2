"""Core modules: personnel areas, assemblers, shuttle factories and module visitors."""