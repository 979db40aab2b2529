"""StudyBook test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Several real components together (JSON file storage, bootstrap).
- functional/   : User-visible flows through the CLI, one scenario per test.
- e2e/          : The command-line frontend invoked as a user would.
- fixtures/     : Shared builders and fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Integration and e2e tests write only under tmp_path or an isolated filesystem.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
