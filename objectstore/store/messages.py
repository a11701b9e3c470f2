"""Message templates shown to users of the store."""

ADD = "Added {name} to stage."
REMOVE = "Added {name} for removal."
REMOVE_NOT_COMMITTED = "Object {name} is not committed."
FOUND = "Found object {name}."

COMMIT = "{message}\n\t{changed} objects changed"
COMMIT_NOTHING = "Nothing to commit, working directory clean."
COMMIT_NOT_EXISTS = "Commit {hash} does not exist."
CHECKOUT = "HEAD is now at {hash}."
LOG_ENTRY = "Commit {hash}\nDate: {date}\n\n\t{message}"

BRANCH_EXISTS = "Branch {branch} already exists."
BRANCH_CREATED = "Created branch {branch}."
BRANCH_SWITCHED = "Switched to branch {branch}."
BRANCH_NOT_EXISTS = "Branch {branch} does not exist."
BRANCH_CANNOT_REMOVE = "Cannot remove current branch."
BRANCH_REMOVED = "Removed branch {branch}."
BRANCH_NO_COMMITS = "Branch {branch} does not have any commits yet."
