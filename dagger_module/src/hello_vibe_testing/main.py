"""Dagger module that runs the Hello Vibe test harness in containers.

Each function returns pytest's output; a failing test run makes the
underlying exec fail, which surfaces as a nonzero `dagger call` exit.
"""

import asyncio

import dagger as dg
from dagger import dag, function, object_type


@object_type
class HelloVibeTesting:
    """Containerized unit, integration and coverage runs for the Hello Vibe API.

    The API is started as a Dagger service and bound under the hostname
    `api` for the e2e suite.
    """

    @function
    def test_container(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> dg.Container:
        """Create a base container with uv and source code.

        Args:
            source: Directory containing the project
            python_version: Python version to use (default: 3.12)

        Returns:
            Container configured with uv and source code
        """
        uv_cache = dag.cache_volume("uv")

        return (
            dag.container()
            .from_(f"ghcr.io/astral-sh/uv:python{python_version}-bookworm-slim")
            .with_mounted_cache("/root/.cache/uv", uv_cache)
            .with_directory("/app", source)
            .with_workdir("/app")
            .with_env_variable("UV_SYSTEM_PYTHON", "1")
        )

    def _pytest(
        self, container: dg.Container, *args: str
    ) -> dg.Container:
        return container.with_exec(["uv", "pip", "install", "-e", ".[test]"]).with_exec(
            ["pytest", *args, "-v", "--tb=short"]
        )

    @function
    async def unit_test(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Run the in-process unit tests with pytest."""
        return await self._pytest(
            self.test_container(source, python_version), "tests/unit"
        ).stdout()

    @function
    async def unit_test_matrix(
        self, source: dg.Directory, versions: str = "3.10,3.11,3.12"
    ) -> str:
        """Run unit tests concurrently on multiple Python versions.

        Args:
            source: Directory containing the project
            versions: Comma-separated list of Python versions

        Returns:
            Formatted test results for all versions
        """
        version_list = [v.strip() for v in versions.split(",")]

        async def test_version(version: str) -> str:
            try:
                result = await self.unit_test(source, version)
                return f"Python {version}: PASSED\n{result}"
            except dg.ExecError as e:
                return f"Python {version}: FAILED\n{e.stdout}\n{e.stderr}"

        results = await asyncio.gather(*[test_version(v) for v in version_list])

        output_lines = ["=== MULTI-VERSION TEST RESULTS ===", ""]
        for result in results:
            output_lines.extend([result, "=" * 50, ""])

        return "\n".join(output_lines)

    @function
    async def run_test(
        self, source: dg.Directory, path: str, python_version: str = "3.12"
    ) -> str:
        """Run tests at a specific path.

        Args:
            source: Directory containing the project
            path: Path to test files or directory
            python_version: Python version to use

        Returns:
            Test output from pytest
        """
        return await self._pytest(
            self.test_container(source, python_version), path
        ).stdout()

    @function
    async def coverage(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Run the whole suite and return the coverage report.

        The e2e tests start their own in-process server here, so the
        coverage figure includes the transport path.
        """
        return await self._pytest(
            self.test_container(source, python_version), "tests"
        ).stdout()

    @function
    def api_service(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> dg.Service:
        """Run the Hello Vibe API as a Dagger service on port 8000."""
        return (
            self.test_container(source, python_version)
            .with_exec(["uv", "pip", "install", "-e", "."])
            .with_env_variable("HELLO_VIBE_PORT", "8000")
            .with_exposed_port(8000)
            .as_service(args=["python", "-m", "hello_vibe"])
        )

    @function
    async def integration_test(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Run the e2e suite against a live API service.

        The service is bound as `api` and its URL passed in through
        API_BASE_URL, so the suite does not start its own server.
        Coverage is not measured here since the server runs in another
        container.
        """
        api_svc = self.api_service(source, python_version)

        return await self._pytest(
            self.test_container(source, python_version)
            .with_service_binding("api", api_svc)
            .with_env_variable("API_BASE_URL", "http://api:8000"),
            "tests/e2e",
            "--no-cov",
        ).stdout()
