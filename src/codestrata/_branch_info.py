# Placeholder for branch information - overwritten by build_script.py during pip/pipx install
# When installing from a git directory, build_script.py populates this with the branch name.
# For PyPI releases or when not in a git repo, this remains None.
# See build_script.py and src/codestrata/lib/core/version.py for details.
BRANCH_NAME = None
