"""Views for browsing and changing the archive."""

from django.contrib import messages
from django.forms import Form
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from server.apps.archive.exceptions import EntryConflictError, InvalidPathError
from server.apps.archive.forms import (
    MoveForm,
    NavigationForm,
    RemoveForm,
    RenameForm,
    UploadForm,
)
from server.apps.archive.logic.context import build_context
from server.apps.archive.logic.entry_operations import (
    download_url,
    hide_entry,
    list_entries,
    move_entry,
    rename_entry,
    search_entries,
    upload_entry,
)
from server.apps.archive.logic.navigation import set_current_path
from server.apps.archive.logic.reconcile_operations import reconcile
from server.apps.archive.models import Entry
from server.apps.members.decorators import member_required

_FILES_URL = 'archive:files'


def _form_error(request: HttpRequest, form: Form) -> HttpResponse:
    for errors in form.errors.values():
        for error in errors:
            messages.warning(request, error)
    return redirect(_FILES_URL)


@member_required
@require_http_methods(['GET', 'POST'])
def files(request: HttpRequest) -> HttpResponse:
    """List the current folder, optionally filtered by name."""
    context = build_context(request)
    search = request.GET.get('search', request.POST.get('search'))

    if search is None:
        entries = list_entries(context.path)
    else:
        entries = search_entries(context.path, search)

    return render(request, 'archive/files.html', {
        'entries': entries,
        'search': search or '',
        'upload_form': UploadForm(),
    })


@member_required
@require_http_methods(['GET', 'POST'])
def navigation_params(request: HttpRequest) -> HttpResponse:
    """Change the current folder; the plain navigation link goes to root."""
    form = NavigationForm(request.POST or None)
    path = form.cleaned_data['path'] if form.is_valid() else None

    try:
        set_current_path(request, path)
    except InvalidPathError as error:
        messages.warning(request, str(error))

    return redirect(_FILES_URL)


@member_required
@require_POST
def upload(request: HttpRequest) -> HttpResponse:
    """Upload a file into the current folder."""
    form = UploadForm(request.POST, request.FILES)
    if not form.is_valid():
        return _form_error(request, form)

    upload_entry(
        build_context(request),
        request.member,
        form.cleaned_data['file'],
    )
    return redirect(_FILES_URL)


@member_required
@require_GET
def refresh(request: HttpRequest) -> HttpResponse:
    """Reconcile the current folder with the remote listing."""
    reconcile(build_context(request))
    return redirect(_FILES_URL)


@member_required
@require_POST
def rename(request: HttpRequest) -> HttpResponse:
    """Rename an entry of the current folder."""
    form = RenameForm(request.POST)
    if not form.is_valid():
        return _form_error(request, form)

    try:
        rename_entry(
            build_context(request),
            form.cleaned_data['old_name'],
            form.cleaned_data['new_name'],
        )
    except Entry.DoesNotExist as error:
        raise Http404('Entry not found') from error
    except EntryConflictError as error:
        messages.warning(request, str(error))

    return redirect(_FILES_URL)


@member_required
@require_POST
def move(request: HttpRequest) -> HttpResponse:
    """Move an entry of the current folder to another folder."""
    form = MoveForm(request.POST)
    if not form.is_valid():
        return _form_error(request, form)

    try:
        move_entry(
            build_context(request),
            form.cleaned_data['name'],
            form.cleaned_data['target'],
        )
    except Entry.DoesNotExist as error:
        raise Http404('Entry not found') from error
    except (EntryConflictError, InvalidPathError) as error:
        messages.warning(request, str(error))

    return redirect(_FILES_URL)


@member_required
@require_POST
def remove(request: HttpRequest) -> HttpResponse:
    """Hide an entry of the current folder."""
    form = RemoveForm(request.POST)
    if not form.is_valid():
        return _form_error(request, form)

    try:
        hide_entry(build_context(request), form.cleaned_data['name'])
    except Entry.DoesNotExist as error:
        raise Http404('Entry not found') from error

    return redirect(_FILES_URL)


@member_required
@require_GET
def download(request: HttpRequest) -> HttpResponse:
    """Redirect to the sharing link of an entry."""
    name = request.GET.get('name', '')
    try:
        url = download_url(build_context(request), name)
    except Entry.DoesNotExist as error:
        raise Http404('Entry not found') from error

    return redirect(url)
