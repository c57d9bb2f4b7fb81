"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every resource uses: DB wiring and
the response envelope. Resource-specific SQL lives in the corresponding
package (e.g. `recommendations/repository.py`).
"""
