"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File operations with side effects: permanent deletion and the interactive
confirmation prompt.
"""
import os


class FileService:
    """
    Side-effecting file operations used by the matcher.
    Errors are wrapped into RuntimeError with a readable message.
    """

    @staticmethod
    def delete_file(file_path: str):
        """
        Permanently deletes a file. Symbolic links are removed themselves,
        their targets are left untouched.
        """
        if not os.path.lexists(file_path):
            raise RuntimeError(f"File not found: {file_path}")

        try:
            os.remove(file_path)
        except OSError as e:
            raise RuntimeError(f"Failed to delete file: {e}") from e

    @staticmethod
    def ask_confirmation(file_path: str) -> bool:
        """Asks on the terminal whether to delete a file. Only 'y' or 'Y' confirms."""
        try:
            try:
                response = input(f"Delete file {file_path} [y/N]: ")
            except UnicodeEncodeError:
                # Name not representable on this terminal (e.g. undecodable bytes)
                response = input(f"Delete file {ascii(file_path)} [y/N]: ")
        except EOFError:
            return False
        return response.strip().lower() == "y"
