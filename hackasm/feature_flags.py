"""Some hardcoded feature flags that is not yet configurable but something like an proposal.

They may reject programs that were accepted before, so they are separate into flags
You can disable them to assemble legacy programs.
"""

# Refuse to allocate variables that would overlap memory-mapped screen (`SCREEN` and upwards)
# Merge plan: move into `AssemblerConfig` once memory map becomes configurable
FEATURE_VARIABLE_MEMORY_LIMIT_CHECK = True
