def pytest_addoption(parser):
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Also run the slow end-to-end scenarios in 'tests/evals'.",
    )


def pytest_configure(config):
    #the 'not slow' filter from pyproject.toml is dropped
    if config.getoption("--run-all"):
        config.option.markexpr = ""
