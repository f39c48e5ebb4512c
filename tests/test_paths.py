import os
import posixpath

from kindconfig.paths import (
    discard_empty_and_duplicates,
    file_exists,
    home_dir,
    path_for_merge,
    paths,
)


def env_from(mapping):
    return lambda key: mapping.get(key, "")


DUPLICATED_LIST = os.pathsep.join(["/foo", "/bar", "", "/foo", "/bar"])


def test_paths_explicit_path():
    result = paths("foo", env_from({"KUBECONFIG": DUPLICATED_LIST, "HOME": "/home"}))
    assert result == ["foo"]


def test_paths_kubeconfig_list():
    result = paths("", env_from({"KUBECONFIG": DUPLICATED_LIST, "HOME": "/home"}))
    assert result == ["/foo", "/bar"]


def test_paths_home_kube_config():
    result = paths("", env_from({"HOME": "/home"}))
    assert result == ["/home/.kube/config"]


def test_discard_empty_and_duplicates_keeps_order():
    assert discard_empty_and_duplicates(["/a", "", "/b", "/a", "/c", "/b"]) == ["/a", "/b", "/c"]


def test_file_exists(tmp_path):
    regular = tmp_path / "file"
    regular.write_text("x")
    assert file_exists(regular) is True
    assert file_exists(tmp_path) is False
    assert file_exists(tmp_path / "missing") is False


def _make_fake_kubeconfigs(tmp_path):
    (tmp_path / "fake-home").mkdir()
    created = []
    for name in ("foo", "bar", "baz"):
        p = tmp_path / name
        p.touch()
        created.append(str(p))
    return created


def test_path_for_merge_explicit_path():
    result = path_for_merge("foo", env_from({"KUBECONFIG": DUPLICATED_LIST, "HOME": "/home"}))
    assert result == "foo"


def test_path_for_merge_kubeconfig_list(tmp_path):
    fake = _make_fake_kubeconfigs(tmp_path)
    result = path_for_merge("", env_from({"KUBECONFIG": os.pathsep.join(fake)}))
    assert result == fake[0]


def test_path_for_merge_selects_first_existing(tmp_path):
    fake = _make_fake_kubeconfigs(tmp_path)
    value = os.pathsep.join(["/bogus/path", fake[1], fake[2]])
    assert path_for_merge("", env_from({"KUBECONFIG": value})) == fake[1]


def test_path_for_merge_select_last_if_none_exist():
    value = os.pathsep.join(["/bogus/path", "/bogus/path/two"])
    result = path_for_merge("", env_from({"KUBECONFIG": value}))
    assert result == "/bogus/path/two"


def test_home_dir_windows_home_with_kube_config(tmp_path):
    fake_home = posixpath.join(str(tmp_path), "fake-home")
    kube_dir = os.path.join(fake_home, ".kube")
    os.makedirs(kube_dir)
    open(os.path.join(kube_dir, "config"), "w").close()

    result = home_dir(
        "windows",
        env_from({"HOME": fake_home, "HOMEDRIVE": "ZZ:", "HOMEPATH": "ZZ:\\Users\\fake-user-zzz"}),
    )
    assert result == fake_home


def test_home_dir_windows_home_without_kube_config(tmp_path):
    fake_home = str(tmp_path)
    result = home_dir(
        "windows",
        env_from(
            {
                "HOME": fake_home,
                "HOMEDRIVE": os.path.splitdrive(fake_home)[0],
                "HOMEPATH": posixpath.join("Users", "fake-user-zzz"),
            }
        ),
    )
    assert result == fake_home


def test_home_dir_windows_none_exist():
    result = home_dir(
        "windows",
        env_from(
            {
                "HOME": "Z:/faaaaake",
                "HOMEDRIVE": "Z:/",
                "HOMEPATH": posixpath.join("Users", "fake-user-zzz"),
            }
        ),
    )
    assert result == "Z:/faaaaake"


def test_home_dir_windows_no_path():
    assert home_dir("windows", lambda key: "") == ""


def test_home_dir_non_windows_uses_home():
    assert home_dir("linux", env_from({"HOME": "/home/someone", "USERPROFILE": "/other"})) == "/home/someone"