"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.

This layer contains:
- eligibility: path exclusion filter
- duplicate_grouper: identity keys and duplicate groups
- primary_selector: choice of the canonical version
- link_reconciler: merge and split of one group
- merge_versions: full library passes with progress reporting
"""
