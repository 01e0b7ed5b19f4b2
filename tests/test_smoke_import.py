"""
烟雾测试：验证包结构与基本导入。
"""


def test_can_import_dronepath():
    import dronepath
    assert dronepath.__version__


def test_core_submodules_exist():
    from dronepath.core import animation, explain, geo, points, recommend, scoring, session, statistics
    for mod in (animation, explain, geo, points, recommend, scoring, session, statistics):
        assert mod is not None


def test_can_import_ui_modules():
    from dronepath.ui import app_router, error_boundary, i18n, map_view, pages, planner, theme
    assert callable(planner.render)
    assert callable(pages.render_algorithms_page)
    assert callable(error_boundary.safe_render)
    assert app_router is not None and i18n is not None and map_view is not None and theme is not None


def test_run_ui_has_main():
    import run_ui
    assert callable(run_ui.main)
