"""GitLab API v3 client.

The legacy v3 API, kept for servers that have not moved to v4. Each entry
of ``ENDPOINTS`` becomes a method of :class:`GitLabV3`, using the same
``"[result =] VERB path[?]"`` form as :mod:`gitlab_api.v4`.
"""

# ruff: noqa: E501

from typing import Any

from .client import GitLabClient
from .endpoints import install_endpoints

ENDPOINTS = {
    # User
    "users": "users = GET users?",
    "user": "user = GET users/:user_id",
    "create_user": "POST users?",
    "edit_user": "PUT users/:user_id?",
    "delete_user": "delete_user = DELETE users/:user_id",
    "current_user": "current_user = GET user",
    "current_user_ssh_keys": "current_user_ssh_keys = GET user/keys",
    "user_ssh_keys": "user_ssh_keys = GET users/:user_id/keys",
    "user_ssh_key": "user_ssh_key = GET user/keys/:key_id",
    "create_current_user_ssh_key": "POST user/keys?",
    "create_user_ssh_key": "POST users/:user_id/keys?",
    "delete_current_user_ssh_key": "DELETE user/keys/:key_id",
    "delete_user_ssh_key": "DELETE users/:user_id/keys/:key_id",
    # Session
    "session": "POST session?",
    # Project
    "projects": "projects = GET projects?",
    "owned_projects": "owned_projects = GET projects/owned",
    "all_projects": "all_projects = GET projects/all",
    "project": "project = GET projects/:project_id",
    "project_events": "project_events = GET projects/:project_id/events",
    "create_project": "POST projects?",
    "create_project_for_user": "POST projects/user/:user_id?",
    "fork_project": "POST projects/fork/:project_id",
    "delete_project": "DELETE projects/:project_id",
    "project_members": "project_members = GET projects/:project_id/members?",
    "project_member": "project_member = GET projects/:project_id/members/:user_id",
    "add_project_member": "POST projects/:project_id/members?",
    "edit_project_member": "PUT projects/:project_id/members/:user_id?",
    "remove_project_member": "DELETE projects/:project_id/members/:user_id",
    "project_hooks": "project_hooks = GET projects/:project_id/hooks",
    "project_hook": "project_hook = GET projects/:project_id/hooks/:hook_id",
    "create_project_hook": "POST projects/:project_id/hooks?",
    "edit_project_hook": "PUT projects/:project_id/hooks/:hook_id?",
    "delete_project_hook": "delete_project_hook = DELETE projects/:project_id/hooks/:hook_id",
    "set_project_fork": "POST projects/:project_id/fork/:forked_from_id",
    "clear_project_fork": "DELETE projects/:project_id/fork",
    "search_projects_by_name": "search_projects_by_name = GET projects/search/:query?",
    # Snippet
    "snippets": "snippets = GET projects/:project_id/snippets",
    "snippet": "snippet = GET projects/:project_id/snippets/:snippet_id",
    "create_snippet": "POST projects/:project_id/snippets?",
    "edit_snippet": "PUT projects/:project_id/snippets/:snippet_id?",
    "delete_snippet": "DELETE projects/:project_id/snippets/:snippet_id",
    "raw_snippet": "raw_snippet = GET projects/:project_id/snippets/:snippet_id/raw",
    # Repository
    "tags": "tags = GET projects/:project_id/repository/tags",
    "create_tag": "POST projects/:project_id/repository/tags?",
    "tree": "tree = GET projects/:project_id/repository/tree?",
    "blob": "blob = GET projects/:project_id/repository/blobs/:ref?",
    "raw_blob": "raw_blob = GET projects/:project_id/repository/raw_blobs/:blob_sha",
    "archive": "archive = GET projects/:project_id/repository/archive?",
    "compare": "compare = GET projects/:project_id/repository/compare?",
    "contributors": "contributors = GET projects/:project_id/repository/contributors",
    # File
    "file": "file = GET projects/:project_id/repository/files?",
    "create_file": "POST projects/:project_id/repository/files?",
    "edit_file": "PUT projects/:project_id/repository/files?",
    "delete_file": "DELETE projects/:project_id/repository/files?",
    # Commit
    "commits": "commits = GET projects/:project_id/repository/commits?",
    "commit": "commit = GET projects/:project_id/repository/commits/:commit_sha",
    "commit_diff": "commit_diff = GET projects/:project_id/repository/commits/:commit_sha/diff",
    "commit_comments": "commit_comments = GET projects/:project_id/repository/commits/:commit_sha/comments",
    "add_commit_comment": "POST projects/:project_id/repository/commits/:commit_sha/comments?",
    # Branch
    "branches": "branches = GET projects/:project_id/repository/branches",
    "branch": "branch = GET projects/:project_id/repository/branches/:branch_name",
    "protect_branch": "PUT projects/:project_id/repository/branches/:branch_name/protect",
    "unprotect_branch": "PUT projects/:project_id/repository/branches/:branch_name/unprotect",
    "create_branch": "create_branch = POST projects/:project_id/repository/branches?",
    "delete_branch": "DELETE projects/:project_id/repository/branches/:branch_name",
    # Merge request
    "merge_requests": "merge_requests = GET projects/:project_id/merge_requests",
    "merge_request": "merge_request = GET projects/:project_id/merge_request/:merge_request_id",
    "create_merge_request": "create_merge_request = POST projects/:project_id/merge_requests?",
    "edit_merge_request": "edit_merge_request = PUT projects/:project_id/merge_requests/:merge_request_id?",
    "accept_merge_request": "PUT projects/:project_id/merge_requests/:merge_request_id/merge?",
    "add_merge_request_comment": "POST projects/:project_id/merge_requests/:merge_request_id/comments?",
    "merge_request_comments": "merge_request_comments = GET projects/:project_id/merge_requests/:merge_request_id/comments",
    # Issue
    "all_issues": "all_issues = GET issues?",
    "issues": "issues = GET projects/:project_id/issues?",
    "issue": "issue = GET projects/:project_id/issues/:issue_id",
    "create_issue": "create_issue = POST projects/:project_id/issues?",
    "edit_issue": "edit_issue = PUT projects/:project_id/issues/:issue_id?",
    # Label
    "labels": "labels = GET projects/:project_id/labels",
    "create_label": "create_label = POST projects/:project_id/labels?",
    "delete_label": "DELETE projects/:project_id/labels?",
    "edit_label": "edit_label = PUT projects/:project_id/labels?",
    # Milestone
    "milestones": "milestones = GET projects/:project_id/milestones",
    "milestone": "milestone = GET projects/:project_id/milestones/:milestone_id",
    "create_milestone": "POST projects/:project_id/milestones?",
    "edit_milestone": "PUT projects/:project_id/milestones/:milestone_id?",
    # Note
    "notes": "notes = GET projects/:project_id/:note_type/:merge_request_id/notes",
    "note": "note = GET projects/:project_id/:note_type/:merge_request_id/notes/:note_id",
    "create_note": "POST projects/:project_id/:note_type/:merge_request_id/notes?",
    # Deploy key
    "deploy_keys": "deploy_keys = GET projects/:project_id/keys",
    "deploy_key": "deploy_key = GET projects/:project_id/keys/:key_id",
    "create_deploy_key": "POST projects/:project_id/keys?",
    "delete_deploy_key": "DELETE projects/:project_id/keys/:key_id",
    # System hook
    "hooks": "hooks = GET hooks",
    "create_hook": "POST hooks?",
    "test_hook": "test_hook = GET hooks/:hook_id",
    "delete_hook": "DELETE hooks/:hook_id",
    # Group
    "groups": "groups = GET groups",
    "group": "group = GET groups/:group_id",
    "create_group": "POST groups?",
    "transfer_project": "POST groups/:group_id/projects/:project_id",
    "delete_group": "DELETE groups/:group_id",
    "group_members": "group_members = GET groups/:group_id/members",
    "add_group_member": "POST groups/:group_id/members?",
    "remove_group_member": "DELETE groups/:group_id/members/:user_id",
    # Service
    "edit_project_service": "PUT projects/:project_id/services/:service_name?",
    "delete_project_service": "DELETE projects/:project_id/services/:service_name",
}


class GitLabV3(GitLabClient):
    """Client for the GitLab v3 API.

    v3 only supports personal tokens, so a token is required and is sent
    as the ``private-token`` header on every request.
    """

    def __init__(self, url: str, token: str | None = None, **kwargs: Any):
        """Initialize the client.

        Args:
            url: Base URL of the API (e.g., "http://git.example.com/api/v3").
            token: GitLab API token.
            **kwargs: Passed to :class:`~gitlab_api.client.GitLabClient`.

        Raises:
            ValueError: If no token is given.
        """
        private_token = kwargs.pop("private_token", None)
        token = token or private_token
        if not token:
            msg = "token is required for the v3 API"
            raise ValueError(msg)
        super().__init__(url, private_token=token, **kwargs)


install_endpoints(GitLabV3, ENDPOINTS)
