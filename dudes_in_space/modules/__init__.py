"""Module and module factory interfaces, capabilities and assembly recipes."""