"""GitLab API v4 client.

A one-to-one interface with the GitLab v4 REST API. Each entry of
``ENDPOINTS`` becomes a method of :class:`GitLabV4`; see GitLab's own API
documentation for the parameters each one accepts.

    api = GitLabV4("https://git.example.com/api/v4", private_token=token)
    branches = api.branches(project_id)

Entries read ``"[result =] VERB path[?]"``: a ``result =`` prefix marks a
method returning the decoded response body, a trailing ``?`` marks one
taking an optional parameters mapping as its last argument.
"""

# ruff: noqa: E501

import warnings

from .client import GitLabClient
from .endpoints import install_endpoints

ENDPOINTS = {
    # Award emoji
    "issue_award_emojis": "award_emojis = GET projects/:project_id/issues/:issue_iid/award_emoji",
    "merge_request_award_emojis": "award_emojis = GET projects/:project_id/merge_requests/:merge_request_iid/award_emoji",
    "snippet_award_emojis": "award_emojis = GET projects/:project_id/merge_requests/:merge_request_id/award_emoji",
    "issue_award_emoji": "award_emoji = GET projects/:project_id/issues/:issue_iid/award_emoji/:award_id",
    "merge_request_award_emoji": "award_emoji = GET projects/:project_id/merge_requests/:merge_request_iid/award_emoji/:award_id",
    "snippet_award_emoji": "award_emoji = GET projects/:project_id/snippets/:snippet_id/award_emoji/:award_id",
    "create_issue_award_emoji": "award_emoji = POST projects/:project_id/issues/:issue_iid/award_emoji?",
    "create_merge_request_award_emoji": "award_emoji = POST projects/:project_id/merge_requests/:merge_request_iid/award_emoji?",
    "create_snippet_award_emoji": "award_emoji = POST projects/:project_id/snippets/:snippet_id/award_emoji",
    "delete_issue_award_emoji": "award_emoji = DELETE projects/:project_id/issues/:issue_id/award_emoji/:award_id",
    "delete_merge_request_award_emoji": "award_emoji = DELETE projects/:project_id/merge_requests/:merge_request_id/award_emoji/:award_id",
    "delete_snippet_award_emoji": "award_emoji = DELETE projects/:project_id/snippets/:snippet_id/award_emoji/:award_id",
    "issue_note_award_emojis": "award_emojis = GET projects/:project_id/issues/:issue_iid/notes/:note_id/award_emoji",
    "issue_note_award_emoji": "award_emoji = GET projects/:project_id/issues/:issue_iid/notes/:note_id/award_emoji/:award_id",
    "create_issue_note_award_emoji": "award_emoji = POST projects/:project_id/issues/:issue_iid/notes/:note_id/award_emoji?",
    "delete_issue_note_award_emoji": "award_emoji = DELETE projects/:project_id/issues/:issue_iid/notes/:note_id/award_emoji/:award_id",
    "merge_request_note_award_emojis": "award_emojis = GET projects/:project_id/merge_requests/:merge_request_iid/notes/:note_id/award_emoji",
    "merge_request_note_award_emoji": "award_emoji = GET projects/:project_id/merge_requests/:merge_request_iid/notes/:note_id/award_emoji/:award_id",
    "create_merge_request_note_award_emoji": "award_emoji = POST projects/:project_id/merge_requests/:merge_request_iid/notes/:note_id/award_emoji?",
    "delete_merge_request_note_award_emoji": "award_emoji = DELETE projects/:project_id/merge_requests/:merge_request_iid/notes/:note_id/award_emoji/:award_id",
    # Branch
    "branches": "branches = GET projects/:project_id/repository/branches",
    "branch": "branch = GET projects/:project_id/repository/branches/:branch_name",
    "create_branch": "branch = POST projects/:project_id/repository/branches?",
    "delete_branch": "DELETE projects/:project_id/repository/branches/:branch_name",
    "delete_merged_branches": "DELETE projects/:project_id/repository/merged_branches",
    # Broadcast message
    "broadcast_messages": "messages = GET broadcast_messages",
    "broadcast_message": "message = GET broadcast_messages/:message_id",
    "create_broadcast_message": "message = POST broadcast_messages?",
    "edit_broadcast_message": "message = PUT broadcast_messages/:message_id?",
    "delete_broadcast_message": "DELETE broadcast_messages/:message_id",
    # Project level variable
    "project_variables": "variables = GET projects/:project_id/variables",
    "project_variable": "variable = GET projects/:project_id/variables/:variable_key",
    "create_project_variable": "variable = POST projects/:project_id/variables?",
    "edit_project_variable": "variable = PUT projects/:project_id/variables/:variable_key?",
    "delete_project_variable": "DELETE projects/:project_id/variables/:variable_key",
    # Group level variable
    "group_variables": "variables = GET groups/:group_id/variables",
    "group_variable": "variable = GET groups/:group_id/variables/:variable_key",
    "create_group_variable": "variable = POST groups/:group_id/variables?",
    "edit_group_variable": "variable = PUT groups/:group_id/variables/:variable_key?",
    "delete_group_variable": "DELETE groups/:group_id/variables/:variable_key",
    # Commit
    "commits": "commits = GET projects/:project_id/repository/commits?",
    "create_commit": "commit = POST projects/:project_id/repository/commits?",
    "commit": "commit = GET projects/:project_id/repository/commits/:commit_sha",
    "cherry_pick_commit": "commit = POST projects/:project_id/repository/commits/:commit_sha/cherry_pick?",
    "commit_diff": "diff = GET projects/:project_id/repository/commits/:commit_sha/diff",
    "commit_comments": "comments = GET projects/:project_id/repository/commits/:commit_sha/comments",
    "create_commit_comment": "POST projects/:project_id/repository/commits/:commit_sha/comments?",
    "commit_statuses": "build_statuses = GET projects/:project_id/repository/commits/:commit_sha/statuses?",
    "create_commit_status": "build_status = POST projects/:project_id/statuses/:commit_sha?",
    # Custom attribute
    "custom_user_attributes": "attributes = GET users/:user_id/custom_attributes",
    "custom_group_attributes": "attributes = GET groups/:group_id/custom_attributes",
    "custom_project_attributes": "attributes = GET projects/:project_id/custom_attributes",
    "custom_user_attribute": "attribute = GET users/:user_id/custom_attributes/:attribute_key",
    "custom_group_attribute": "attribute = GET groups/:group_id/custom_attributes/:attribute_key",
    "custom_project_attribute": "attribute = GET projects/:project_id/custom_attributes/:attribute_key",
    "set_custom_user_attribute": "attribute = PUT users/:user_id/custom_attributes/:attribute_key?",
    "set_custom_group_attribute": "attribute = PUT groups/:group_id/custom_attributes/:attribute_key?",
    "set_custom_project_attribute": "attribute = PUT projects/:project_id/custom_attributes/:attribute_key?",
    "delete_custom_user_attribute": "DELETE users/:user_id/custom_attributes/:attribute_key",
    "delete_custom_group_attribute": "DELETE groups/:group_id/custom_attributes/:attribute_key",
    "delete_custom_project_attribute": "DELETE projects/:project_id/custom_attributes/:attribute_key",
    # Deployment
    "deployments": "deployments = GET projects/:project_id/deployments",
    "deployment": "deployment = GET projects/:project_id/deployments/:deployment_id",
    # Deploy key
    "all_deploy_keys": "keys = GET deploy_keys",
    "deploy_keys": "keys = GET projects/:project_id/deploy_keys",
    "deploy_key": "key = GET projects/:project_id/deploy_keys/:key_id",
    "create_deploy_key": "key = POST projects/:project_id/deploy_keys?",
    "delete_deploy_key": "DELETE projects/:project_id/deploy_keys/:key_id",
    "enable_deploy_key": "key = POST projects/:project_id/deploy_keys/:key_id/enable",
    # Environment
    "environments": "environments = GET projects/:project_id/environments",
    "create_environment": "environment = POST projects/:project_id/environments?",
    "edit_environment": "environment = PUT projects/:project_id/environments/:environments_id?",
    "delete_environment": "DELETE projects/:project_id/environments/:environment_id",
    "stop_environment": "environment = POST projects/:project_id/environments/:environment_id/stop",
    # Event
    "all_events": "events = GET events?",
    "user_events": "events = GET users/:user_id/events?",
    "project_events": "events = GET projects/:project_id/events?",
    # Feature flag
    "features": "features = GET features",
    "set_feature": "feature = POST features/:name?",
    # Gitignores template
    "gitignores_templates": "templates = GET templates/gitignores",
    "gitignores_template": "template = GET templates/gitignores/:template_key",
    # GitLab CI config template
    "gitlab_ci_ymls_templates": "templates = GET templates/gitlab_ci_ymls",
    "gitlab_ci_ymls_template": "template = GET templates/gitlab_ci_ymls/:template_key",
    # Group
    "groups": "groups = GET groups?",
    "group_subgroups": "subgroups = GET groups/:group_id/subgroups?",
    "group_projects": "projects = GET groups/:group_id/projects?",
    "group": "group = GET groups/:group_id",
    "create_group": "POST groups?",
    "transfer_project_to_group": "POST groups/:group_id/projects/:project_id",
    "edit_group": "group = PUT groups/:group_id?",
    "delete_group": "DELETE groups/:group_id",
    "sync_group_with_ldap": "POST groups/:group_id/ldap_sync",
    "create_ldap_group_link": "POST groups/:group_id/ldap_group_links?",
    "delete_ldap_group_link": "DELETE groups/:group_id/ldap_group_links/:cn",
    "delete_ldap_provider_group_link": "DELETE groups/:group_id/ldap_group_links/:provider/:cn",
    # Group and project member
    "group_members": "members = GET groups/:group_id/members?",
    "project_members": "members = GET projects/:project_id/members?",
    "group_member": "member = GET groups/:project_id/members/:user_id",
    "project_member": "member = GET projects/:project_id/members/:user_id",
    "add_group_member": "member = POST groups/:group_id/members?",
    "add_project_member": "member = POST projects/:project_id/members?",
    "update_group_member": "member = PUT groups/:group_id/members/:user_id?",
    "update_project_member": "member = PUT projects/:project_id/members/:user_id?",
    "remove_group_member": "DELETE groups/:group_id/members/:user_id",
    "remove_project_member": "DELETE projects/:project_id/members/:user_id",
    # Issue
    "global_issues": "issues = GET issues?",
    "group_issues": "issues = GET groups/:group_id/issues?",
    "issues": "issues = GET projects/:project_id/issues?",
    "issue": "issue = GET projects/:project_id/issues/:issue_iid",
    "create_issue": "issue = POST projects/:project_id/issues?",
    "edit_issue": "issue = PUT projects/:project_id/issues/:issue_iid?",
    "delete_issue": "DELETE projects/:project_id/issues/:issue_iid",
    "move_issue": "issue = POST projects/:project_id/issues/:issue_iid/move?",
    "subscribe_to_issue": "issue = POST projects/:project_id/issues/:issue_iid/subscribe",
    "unsubscribe_from_issue": "issue = POST projects/:project_id/issues/:issue_iid/unsubscribe",
    "create_issue_todo": "todo = POST projects/:project_id/issues/:issue_iid/todo",
    "set_issue_time_estimate": "tracking = POST projects/:project_id/issues/:issue_iid/time_estimate?",
    "reset_issue_time_estimate": "tracking = POST projects/:project_id/issues/:issue_iid/reset_time_estimate",
    "add_issue_spent_time": "tracking = POST projects/:project_id/issues/:issue_iid/add_spent_time?",
    "reset_issue_spent_time": "tracking = POST projects/:project_id/issues/:issue_iid/reset_spent_time",
    "issue_time_stats": "tracking = GET projects/:project_id/issues/:issue_iid/time_stats",
    "issue_closed_by": "merge_requests = GET projects/:project_id/issues/:issue_iid/closed_by",
    "issue_user_agent_detail": "user_agent = GET projects/:project_id/issues/:issue_iid/user_agent_detail",
    # Issue board
    "project_boards": "boards = GET projects/:project_id/boards",
    "project_board_lists": "lists = GET projects/:project_id/boards/:board_id/lists",
    "project_board_list": "list = GET projects/:project_id/boards/:board_id/lists/:list_id",
    "create_project_board_list": "list = POST projects/:project_id/boards/:board_id/lists?",
    "edit_project_board_list": "list = PUT projects/:project_id/boards/:board_id/lists/:list_id?",
    "delete_project_board_list": "DELETE projects/:project_id/boards/:board_id/lists/:list_id",
    # Job
    "jobs": "jobs = GET projects/:project_id/jobs?",
    "pipeline_jobs": "jobs = GET projects/:project_id/pipelines/:pipeline_id/jobs?",
    "job": "job = GET projects/:project_id/jobs/:job_id",
    "job_artifacts": "artifacts = GET projects/:project_id/jobs/:job_id/artifacts",
    "job_artifacts_archive": "archive = GET projects/:project_id/jobs/artifacts/:ref_name/download?",
    "job_artifacts_file": "file = GET projects/:project_id/jobs/:job_id/artifacts/:artifact_path",
    "job_trace_file": "file = GET projects/:project_id/jobs/:job_id/trace",
    "cancel_job": "job = POST projects/:project_id/jobs/:job_id/cancel",
    "retry_job": "job = POST projects/:project_id/jobs/:job_id/retry",
    "erase_job": "job = POST projects/:project_id/jobs/:job_id/erase",
    "keep_job_artifacts": "job = POST projects/:project_id/jobs/:job_id/artifacts/keep",
    "play_job": "job = POST projects/:project_id/jobs/:job_id/play",
    # Key
    "key": "key = GET keys/:key_id",
    # Label
    "labels": "labels = GET projects/:project_id/labels",
    "create_label": "label = POST projects/:project_id/labels?",
    "delete_label": "DELETE projects/:project_id/labels?",
    "edit_label": "label = PUT projects/:project_id/labels?",
    "subscribe_to_label": "label = POST projects/:project_id/labels/:label_id/subscribe",
    "unsubscribe_from_label": "POST projects/:project_id/labels/:label_id/unsubscribe",
    # Merge request
    "global_merge_requests": "merge_requests = GET merge_requests?",
    "merge_requests": "merge_requests = GET projects/:project_id/merge_requests?",
    "merge_request": "merge_request = GET projects/:project_id/merge_requests/:merge_request_iid",
    "merge_request_commits": "commits = GET projects/:project_id/merge_requests/:merge_request_iid/commits",
    "merge_request_with_changes": "merge_request = GET projects/:project_id/merge_requests/:merge_request_iid/changes",
    "create_merge_request": "merge_request = POST projects/:project_id/merge_requests?",
    "edit_merge_request": "merge_request = PUT projects/:project_id/merge_requests/:merge_request_iid?",
    "delete_merge_request": "DELETE projects/:project_id/merge_requests/:merge_request_iid",
    "accept_merge_request": "merge_request = PUT projects/:project_id/merge_requests/:merge_request_iid/merge?",
    "cancel_merge_when_pipeline_succeeds": "merge_request = PUT projects/:project_id/merge_requests/:merge_request_iid/cancel_merge_when_pipeline_succeeds",
    "merge_request_closes_issues": "issues = GET projects/:project_id/merge_requests/:merge_request_iid/closes_issues",
    "subscribe_to_merge_request": "merge_request = POST projects/:project_id/merge_requests/:merge_request_iid/subscribe",
    "unsubscribe_from_merge_request": "merge_request = POST projects/:project_id/merge_requests/:merge_request_iid/unsubscribe",
    "create_merge_request_todo": "todo = POST projects/:project_id/merge_requests/:merge_request_iid/todo",
    "merge_request_diff_versions": "versions = GET projects/:project_id/merge_requests/:merge_request_iid/versions",
    "merge_request_diff_version": "version = GET projects/:project_id/merge_requests/:merge_request_iid/versions/:version_id",
    "set_merge_request_time_estimate": "tracking = POST projects/:project_id/merge_requests/:merge_request_iid/time_estimate?",
    "reset_merge_request_time_estimate": "tracking = POST projects/:project_id/merge_requests/:merge_request_iid/reset_time_estimate",
    "add_merge_request_spent_time": "tracking = POST projects/:project_id/merge_requests/:merge_request_iid/add_spent_time?",
    "reset_merge_request_spent_time": "tracking = POST projects/:project_id/merge_requests/:merge_request_iid/reset_spent_time",
    "merge_request_time_stats": "tracking = GET projects/:project_id/merge_requests/:merge_request_iid/time_stats",
    # Project milestone
    "project_milestones": "milestones = GET projects/:project_id/milestones?",
    "project_milestone": "milestone = GET projects/:project_id/milestones/:milestone_id",
    "create_project_milestone": "milestone = POST projects/:project_id/milestones?",
    "edit_project_milestone": "milestone = PUT projects/:project_id/milestones/:milestone_id?",
    "project_milestone_issues": "issues = GET projects/:project_id/milestones/:milestone_id/issues",
    "project_milestone_merge_requests": "merge_requests = GET projects/:project_id/milestones/:milestone_id/merge_requests",
    # Group milestone
    "group_milestones": "milestones = GET groups/:group_id/milestones?",
    "group_milestone": "milestone = GET groups/:group_id/milestones/:milestone_id",
    "create_group_milestone": "milestone = POST groups/:group_id/milestones?",
    "edit_group_milestone": "milestone = PUT groups/:group_id/milestones/:milestone_id?",
    "group_milestone_issues": "issues = GET groups/:group_id/milestones/:milestone_id/issues",
    "group_milestone_merge_requests": "merge_requests = GET groups/:group_id/milestones/:milestone_id/merge_requests",
    # Namespace
    "namespaces": "namespaces = GET namespaces?",
    "namespace": "namespace = GET namespaces/:namespace_id",
    # Note
    "issue_notes": "notes = GET projects/:project_id/issues/:issue_iid/notes?",
    "issue_note": "note = GET projects/:project_id/issues/:issue_iid/notes/:note_id",
    "create_issue_note": "note = POST projects/:project_id/issues/:issue_iid/notes?",
    "edit_issue_note": "PUT projects/:project_id/issues/:issue_iid/notes/:note_id?",
    "delete_issue_note": "DELETE projects/:project_id/issues/:issue_iid/notes/:note_id",
    "snippet_notes": "notes = GET projects/:project_id/snippets/:snippet_id/notes?",
    "snippet_note": "note = GET projects/:project_id/snippets/:snippet_id/notes/:note_id",
    "create_snippet_note": "note = POST projects/:project_id/snippets/:snippet_id/notes?",
    "edit_snippet_note": "PUT projects/:project_id/snippets/:snippet_id/notes/:note_id?",
    "delete_snippet_note": "DELETE projects/:project_id/snippets/:snippet_id/notes/:note_id",
    "merge_request_notes": "notes = GET projects/:project_id/merge_requests/:merge_request_iid/notes?",
    "merge_request_note": "note = GET projects/:project_id/merge_requests/:merge_request_iid/notes/:note_id",
    "create_merge_request_note": "note = POST projects/:project_id/merge_requests/:merge_request_iid/notes?",
    "edit_merge_request_note": "PUT projects/:project_id/merge_requests/:merge_request_iid/notes/:note_id?",
    "delete_merge_request_note": "DELETE projects/:project_id/merge_requests/:merge_request_iid/notes/:note_id",
    # Notification setting
    "global_notification_settings": "settings = GET notification_settings",
    "set_global_notification_settings": "settings = PUT notification_settings?",
    "group_notification_settings": "settings = GET groups/:group_id/notification_settings",
    "project_notification_settings": "settings = GET projects/:project_id/notification_settings",
    "set_group_notification_settings": "settings = PUT groups/:group_id/notification_settings?",
    "set_project_notification_settings": "settings = PUT projects/:project_id/notification_settings?",
    # Open source license template
    "license_templates": "templates = GET templates/licenses?",
    "license_template": "template = GET templates/licenses/:template_key?",
    # Page domain
    "global_pages_domains": "domains = GET pages/domains",
    "pages_domains": "domains = GET projects/:project_id/pages/domains",
    "pages_domain": "domain = GET projects/:project_id/pages/domains/:domain",
    "create_pages_domain": "domain = POST projects/:project_id/pages/domains?",
    "edit_pages_domain": "domain = PUT projects/:project_id/pages/domains/:domain?",
    "delete_pages_domain": "DELETE projects/:project_id/pages/domains/:domain",
    # Pipeline
    "pipelines": "pipelines = GET projects/:project_id/pipelines?",
    "pipeline": "pipeline = GET projects/:project_id/pipelines/:pipeline_id",
    "create_pipeline": "pipeline = POST projects/:project_id/pipeline?",
    "retry_pipeline_jobs": "pipeline = POST projects/:project_id/pipelines/:pipeline_id/retry",
    "cancel_pipeline_jobs": "pipeline = POST projects/:project_id/pipelines/:pipeline_id/cancel",
    # Pipeline trigger
    "triggers": "triggers = GET projects/:project_id/triggers",
    "trigger": "trigger = GET projects/:project_id/triggers/:trigger_id",
    "create_trigger": "trigger = POST projects/:project_id/triggers?",
    "edit_trigger": "trigger = PUT projects/:project_id/triggers/:trigger_id?",
    "take_ownership_of_trigger": "trigger = POST projects/:project_id/triggers/:trigger_id/take_ownership",
    "delete_trigger": "DELETE projects/:project_id/triggers/:trigger_id",
    # Pipeline schedule
    "pipeline_schedules": "schedules = GET projects/:project_id/pipeline_schedules?",
    "pipeline_schedule": "schedule = GET projects/:project_id/pipeline_schedules/:pipeline_schedule_id",
    "create_pipeline_schedule": "schedule = POST projects/:project_id/pipeline_schedules?",
    "edit_pipeline_schedule": "schedule = PUT projects/:project_id/pipeline_schedules/:pipeline_schedule_id?",
    "take_ownership_of_pipeline_schedule": "schedule = POST projects/:project_id/pipeline_schedules/:pipeline_schedule_id/take_ownership",
    "delete_pipeline_schedule": "schedule = DELETE projects/:project_id/pipeline_schedules/:pipeline_schedule_id",
    "create_pipeline_schedule_variable": "variable = POST projects/:project_id/pipeline_schedules/:pipeline_schedule_id/variables?",
    "edit_pipeline_schedule_variable": "variable = PUT projects/:project_id/pipeline_schedules/:pipeline_schedule_id/variables/:variable_key?",
    "delete_pipeline_schedule_variable": "variable = DELETE projects/:project_id/pipeline_schedules/:pipeline_schedule_id/variables/:variable_key",
    # Project
    "projects": "projects = GET projects?",
    "user_projects": "projects = GET users/:user_id/projects?",
    "project": "project = GET projects/:project_id?",
    "project_users": "users = GET projects/:project_id/users",
    "create_project": "project = POST projects?",
    "create_project_for_user": "POST projects/user/:user_id?",
    "edit_project": "PUT projects/:project_id?",
    "fork_project": "POST projects/:project_id/fork?",
    "project_forks": "forks = GET projects/:project_id/forks?",
    "start_project": "project = POST projects/:project_id/star",
    "unstar_project": "project = POST projects/:project_id/unstar",
    "archive_project": "project = POST projects/:project_id/archive",
    "unarchive_project": "project = POST projects/:project_id/unarchive",
    "delete_project": "DELETE projects/:project_id",
    "upload_file_to_project": "upload = POST projects/:project_id/uploads?",
    "share_project_with_group": "POST projects/:project_id/share?",
    "unshare_project_with_group": "DELETE projects/:project_id/share/:group_id",
    "project_hooks": "hooks = GET projects/:project_id/hooks",
    "project_hook": "hook = GET project/:project_id/hooks/:hook_id",
    "create_project_hook": "POST projects/:project_id/hooks?",
    "edit_project_hook": "PUT projects/:project_id/hooks/:hook_id?",
    "delete_project_hook": "hook = DELETE projects/:project_id/hooks/:hook_id",
    "set_project_fork": "POST projects/:project_id/fork/:from_project_id",
    "clear_project_fork": "DELETE projects/:project_id/fork",
    "start_housekeeping": "POST projects/:project_id/housekeeping",
    # Project access request
    "group_access_requests": "requests = GET groups/:group_id/access_requests",
    "project_access_requests": "requests = GET projects/:project_id/access_requests",
    "request_group_access": "request = POST groups/:group_id/access_requests",
    "request_project_access": "request = POST projects/:project_id/access_requests",
    "approve_group_access": "request = PUT groups/:group_id/access_requests/:user_id/approve",
    "approve_project_access": "request = PUT projects/:project_id/access_requests/:user_id/approve",
    "deny_group_access": "DELETE groups/:group_id/access_requests/:user_id",
    "deny_project_access": "DELETE projects/:project_id/access_requests/:user_id",
    # Project snippet
    "snippets": "snippets = GET projects/:project_id/snippets",
    "snippet": "snippet = GET projects/:project_id/snippets/:snippet_id",
    "create_snippet": "POST projects/:project_id/snippets?",
    "edit_snippet": "PUT projects/:project_id/snippets/:snippet_id?",
    "delete_snippet": "DELETE projects/:project_id/snippets/:snippet_id",
    "snippet_content": "content = GET projects/:project_id/snippets/:snippet_id/raw",
    "snippet_user_agent_detail": "user_agent = GET projects/:project_id/snippets/:snippet_id/user_agent_detail",
    # Protected branch
    "protected_branches": "branches = GET projects/:project_id/protected_branches",
    "protected_branch": "branch = GET projects/:project_id/protected_branches/:branch_name",
    "protect_branch": "branch = POST projects/:project_id/protected_branches?",
    "unprotect_branch": "DELETE projects/:project_id/protected_branches/:branch_name",
    # Repository
    "tree": "tree = GET projects/:project_id/repository/tree?",
    "blob": "blob = GET projects/:project_id/repository/blobs/:sha",
    "raw_blob": "raw_blob = GET projects/:project_id/repository/blobs/:sha/raw",
    "archive": "archive = GET projects/:project_id/repository/archive?",
    "compare": "comparison = GET projects/:project_id/repository/compare?",
    "contributors": "contributors = GET projects/:project_id/repository/contributors",
    # File
    "file": "file = GET projects/:project_id/repository/files/:file_path?",
    "raw_file": "file = GET projects/:project_id/repository/files/:file_path/raw?",
    "create_file": "POST projects/:project_id/repository/files/:file_path?",
    "edit_file": "PUT projects/:project_id/repository/files/:file_path?",
    "delete_file": "DELETE projects/:project_id/repository/files/:file_path?",
    # Runner
    "runners": "runners = GET runners?",
    "all_runners": "runners = GET runners/all?",
    "runner": "runner = GET runners/:runner_id",
    "update_runner": "runner = PUT runners/:runner_id?",
    "delete_runner": "runner = DELETE runners/:runner_id",
    "runner_jobs": "jobs = GET runners/:runner_id/jobs?",
    "project_runners": "runners = GET projects/:project_id/runners",
    "enable_project_runner": "runner = POST projects/:project_id/runners?",
    "disable_project_runner": "runner = DELETE projects/:project_id/runners/:runner_id",
    # Service
    "project_service": "service = GET projects/:project_id/services/:service_name",
    "edit_project_service": "PUT projects/:project_id/services/:service_name?",
    "delete_project_service": "DELETE projects/:project_id/services/:service_name",
    # Settings
    "settings": "settings = GET application/settings",
    "update_settings": "settings = PUT application/settings?",
    # Sidekiq metric
    "queue_metrics": "metrics = GET sidekiq/queue_metrics",
    "process_metrics": "metrics = GET sidekiq/process_metrics",
    "job_stats": "stats = GET sidekiq/job_stats",
    "compound_metrics": "metrics = GET sidekiq/compound_metrics",
    # System hook
    "hooks": "hooks = GET hooks",
    "create_hook": "POST hooks?",
    "test_hook": "hook = GET hooks/:hook_id",
    "delete_hook": "DELETE hooks/:hook_id",
    # Tag
    "tags": "tags = GET projects/:project_id/repository/tags",
    "tag": "tag = GET projects/:project_id/repository/tags/:tag_name",
    "create_tag": "tag = POST projects/:project_id/repository/tags?",
    "delete_tag": "DELETE projects/:project_id/repository/tags/:tag_name",
    "create_release": "POST projects/:project_id/repository/tags/:tag_name/release?",
    "edit_release": "PUT projects/:project_id/repository/tags/:tag_name/release?",
    # Todo
    # User
    "users": "users = GET users?",
    "user": "user = GET users/:user_id",
    "create_user": "POST users?",
    "edit_user": "PUT users/:user_id?",
    "delete_user": "DELETE users/:user_id",
    "current_user": "user = GET user",
    "current_user_ssh_keys": "keys = GET user/keys",
    "user_ssh_keys": "keys = GET users/:user_id/keys",
    "user_ssh_key": "key = GET user/keys/:key_id",
    "create_current_user_ssh_key": "POST user/keys?",
    "create_user_ssh_key": "POST users/:user_id/keys?",
    "delete_current_user_ssh_key": "DELETE user/keys/:key_id",
    "delete_user_ssh_key": "DELETE users/:user_id/keys/:key_id",
    "current_user_gpg_keys": "keys = GET user/gpg_keys",
    "current_user_gpg_key": "key = GET user/gpg_keys/:key_id",
    "create_current_user_gpg_key": "POST user/gpg_keys?",
    "delete_current_user_gpg_key": "DELETE user/gpg_keys/:key_id",
    "user_gpg_keys": "keys = GET users/:user_id/gpg_keys",
    "user_gpg_key": "key = GET users/:user_id/gpg_keys/:key_id",
    "create_user_gpg_key": "keys = POST users/:user_id/gpg_keys?",
    "delete_user_gpg_key": "DELETE users/:user_id/gpg_keys/:key_id",
    "current_user_emails": "emails = GET user/emails",
    "user_emails": "emails = GET users/:user_id/emails",
    "current_user_email": "email = GET user/emails/:email_id",
    "create_current_user_email": "email = POST user/emails?",
    "create_user_email": "email = POST users/:user_id/emails?",
    "delete_current_user_email": "DELETE user/emails/:email_id",
    "delete_user_email": "DELETE users/:user_id/emails/:email_id",
    "block_user": "success = POST users/:user_id/block",
    "unblock_user": "success = POST users/:user_id/unblock",
    "user_impersonation_tokens": "tokens = GET users/:user_id/impersonation_tokens?",
    "user_impersonation_token": "token = GET users/:user_id/impersonation_tokens/:impersonation_token_id",
    "create_user_impersonation_token": "token = POST users/:user_id/impersonation_tokens?",
    "delete_user_impersonation_token": "DELETE users/:user_id/impersonation_tokens/:impersonation_token_id",
    "all_user_activities": "activities = GET user/activities",
    # Validate CI configuration
    "lint": "result = POST lint?",
    # Version
    "version": "version = GET version",
    # Wiki
    "wiki_pages": "pages = GET projects/:project_id/wikis?",
    "wiki_page": "pages = GET projects/:project_id/wikis/:slug",
    "create_wiki_page": "page = POST projects/:project_id/wikis?",
    "edit_wiki_page": "page = PUT projects/:project_id/wikis/:slug?",
    "delete_wiki_page": "DELETE projects/:project_id/wikis/:slug",
}


class GitLabV4(GitLabClient):
    """Client for the GitLab v4 API.

    Authenticate with either ``access_token`` (OAuth2) or
    ``private_token`` (personal access token). Without either the client
    is anonymous and greatly limited in what it can do.

    Many calls take a ``project_id``, which may be the numeric ID or a
    ``"namespace/project"`` path; path values are URL-encoded.
    """

    def raw_snippet(self, *args):
        """Deprecated alias of :meth:`snippet_content`."""
        warnings.warn(
            "raw_snippet is deprecated, use snippet_content instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.snippet_content(*args)


install_endpoints(GitLabV4, ENDPOINTS)
