"""
User interaction for the authorization step.
Blocking Tk dialogs by default, plain console prompts as an alternative.
"""
import webbrowser


class UserInteraction:
    """Blocking confirm / prompt / notify capability used by the authorization flow."""

    def confirm(self, title, message):
        """Ask an OK/Cancel question. Returns True on OK."""
        raise NotImplementedError

    def prompt(self, message):
        """Ask for a line of text. Returns None if the user dismissed the prompt."""
        raise NotImplementedError

    def notify(self, title, message, level="info"):
        """Show a message; level is "info" or "error"."""
        raise NotImplementedError

    def open_url(self, url):
        """Open the URL in the user's browser."""
        webbrowser.open_new_tab(url)

    def close(self):
        """Release whatever the interaction holds open."""


class ConsoleInteraction(UserInteraction):
    """Interaction through stdin/stdout."""

    def confirm(self, title, message):
        print(f"\n{title}\n{message}")
        try:
            response = input("Continue? (y/n): ").strip().lower()
        except EOFError:
            return False
        return response in ['y', 'yes']

    def prompt(self, message):
        print(message)
        try:
            return input("> ").strip()
        except EOFError:
            return None

    def notify(self, title, message, level="info"):
        marker = "❌" if level == "error" else "ℹ️"
        print(f"{marker} {title}: {message}")


class DialogInteraction(UserInteraction):
    """Interaction through modal Tk dialogs."""

    def __init__(self):
        import tkinter
        from tkinter import messagebox, simpledialog

        self._messagebox = messagebox
        self._simpledialog = simpledialog
        # Hidden root window so only the dialogs show up
        self._root = tkinter.Tk()
        self._root.withdraw()

    def confirm(self, title, message):
        return bool(self._messagebox.askokcancel(title, message, icon=self._messagebox.QUESTION,
                                                 parent=self._root))

    def prompt(self, message):
        return self._simpledialog.askstring("Flickr Authorization", message, parent=self._root)

    def notify(self, title, message, level="info"):
        if level == "error":
            self._messagebox.showerror(title, message, parent=self._root)
        else:
            self._messagebox.showinfo(title, message, parent=self._root)

    def close(self):
        self._root.destroy()


def create_interaction(console=False):
    """Pick the interaction: Tk dialogs unless console mode was requested."""
    if console:
        return ConsoleInteraction()
    return DialogInteraction()
