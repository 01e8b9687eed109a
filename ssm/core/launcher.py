import logging
import shutil
import subprocess
import sys

from .errors import LaunchError, SSHClientNotFound

logger = logging.getLogger(__name__)


class Launcher:
    """
    Runs the system SSH client for a profile in the foreground.
    """
    def __init__(self, platform=None):
        self.platform = platform or sys.platform

    def find_client(self):
        """
        Locates the SSH executable on PATH.

        Returns:
            str: Path (or name) of the executable to run.

        Raises:
            SSHClientNotFound: If no client is installed.
        """
        if self.platform.startswith("win"):
            path = shutil.which("ssh.exe")
            if not path:
                raise SSHClientNotFound("ssh.exe not found in PATH. Please install OpenSSH client.")
            return path

        path = shutil.which("ssh")
        if not path:
            raise SSHClientNotFound("ssh not found in PATH. Please install an OpenSSH client.")
        return path

    def build_command(self, profile, ssh_path="ssh"):
        """
        Builds the argument list for connecting to a profile.

        Args:
            profile (Profile): Fully resolved profile.
            ssh_path (str): Executable to invoke.
        """
        cmd = [ssh_path, f"{profile.username}@{profile.host}"]
        cmd.append("-p")
        cmd.append(str(profile.port))
        cmd.append("-i")
        cmd.append(str(profile.key_path))
        return cmd

    def launch(self, profile):
        """
        Starts an interactive session and waits for it to finish.

        The child inherits this process's stdin, stdout and stderr, so it
        owns the terminal until it exits.

        Args:
            profile (Profile): Fully resolved profile.

        Returns:
            int: Exit status of the SSH client.
        """
        cmd = self.build_command(profile, self.find_client())
        logger.info(f"[{profile.name}] Launching SSH command: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd)
        except OSError as exc:
            raise LaunchError(f"Failed to run SSH command: {exc}") from exc

        if result.returncode != 0:
            logger.info("[%s] SSH exited with status %d", profile.name, result.returncode)
        return result.returncode
