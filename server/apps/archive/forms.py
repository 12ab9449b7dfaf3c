"""Forms for archive actions."""

from django import forms


class NavigationForm(forms.Form):
    """Folder to navigate to."""

    path = forms.CharField(max_length=1024, required=False)


class UploadForm(forms.Form):
    """File to upload into the current folder."""

    file = forms.FileField(required=False)


class RenameForm(forms.Form):
    """Rename an entry of the current folder."""

    old_name = forms.CharField(max_length=255)
    new_name = forms.CharField(max_length=255)

    def clean_new_name(self) -> str:
        """Reject names that would leave the current folder."""
        new_name = self.cleaned_data['new_name'].strip()
        if '/' in new_name or new_name in {'.', '..'}:
            raise forms.ValidationError('Names cannot contain "/".')
        return new_name


class MoveForm(forms.Form):
    """Move an entry of the current folder."""

    name = forms.CharField(max_length=255)
    target = forms.CharField(max_length=1024)

    def clean_target(self) -> str:
        """Reject targets that climb out of the archive."""
        target = self.cleaned_data['target'].strip()
        if '..' in target.split('/'):
            raise forms.ValidationError('Target folder cannot contain "..".')
        return target


class RemoveForm(forms.Form):
    """Hide an entry of the current folder."""

    name = forms.CharField(max_length=255)
