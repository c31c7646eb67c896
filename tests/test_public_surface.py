"""Test public API surface - ensure imports work correctly."""


def test_root_exports():
    import secretgrab

    for name in ("summarise", "run_pipeline", "PipelineResult", "PipelineStatus", "SecretArtifacts"):
        assert name in secretgrab.__all__
        assert hasattr(secretgrab, name)


def test_api_exports_core_functions():
    from secretgrab.api import summarise, run_pipeline, run_pipeline_from_path, grab_live

    for func in (summarise, run_pipeline, run_pipeline_from_path, grab_live):
        assert callable(func)


def test_root_functions_are_api_functions():
    import secretgrab
    import secretgrab.api

    assert secretgrab.summarise is secretgrab.api.summarise
    assert secretgrab.run_pipeline is secretgrab.api.run_pipeline


def test_status_codes_are_strings():
    from secretgrab import PipelineStatus

    assert PipelineStatus.OK == "OK"
    assert PipelineStatus.NO_REAL_SECRETS == "NO_REAL_SECRETS"
