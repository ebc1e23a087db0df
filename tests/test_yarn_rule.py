from lockguard.rules.yarn import YarnRule


def check(line):
    return YarnRule().check(line, 1)


def test_bare_yarn_and_install_are_flagged():
    for line in ("yarn", "yarn install", "yarn && yarn build", "RUN yarn install;"):
        violations = check(line)
        assert len(violations) == 1, line
        assert "--frozen-lockfile" in violations[0].message


def test_frozen_or_immutable_installs_are_allowed():
    for line in (
        "yarn install --frozen-lockfile",
        "yarn install --immutable",
        "yarn --frozen-lockfile",
        "yarn --immutable",
    ):
        assert check(line) == [], line


def test_add_without_version_is_flagged():
    violations = check("yarn add bar")

    assert len(violations) == 1
    assert "version pin" in violations[0].message


def test_add_with_version_is_allowed():
    assert check("yarn add bar@2.0.0") == []


def test_global_add_requires_pin():
    assert len(check("yarn global add serve")) == 1
    assert check("yarn global add serve@14.2.0") == []


def test_scoped_and_dev_adds():
    assert "version pin" in check("yarn add @babel/core")[0].message
    assert check("yarn add @babel/core@7.22.0") == []
    assert "version pin" in check("yarn add -D jest")[0].message
    assert check("yarn add -D jest@29.0.0") == []


def test_other_yarn_commands_are_ignored():
    assert check("yarn build") == []
    assert check("cat yarn.lock") == []
