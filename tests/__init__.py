"""PERSONA test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The installed CLI driven through Click's CliRunner.

General guidance
- Domain tests assert exact error messages; they are part of the public contract.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, e2e, property
"""
