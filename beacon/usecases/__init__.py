"""Use-case layer coordinating domain objects and ports.

Use cases never perform transport I/O directly; they call ports and translate
adapter failures into ``UseCaseError``.
"""
